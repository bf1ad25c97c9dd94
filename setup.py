# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="betterls",
    version="0.1.0",
    description="Better ls: list directory contents with sizes and dates as a table or JSON",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["betterls*"]),
    package_data={
        "betterls.interface": ["locales/*.json"],
    },
    python_requires=">=3.9",
    install_requires=[
        "rich",  # Table rendering and colored notices
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'betterls=betterls.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
