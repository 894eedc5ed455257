# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="foldertree",
    version="28.10.25",
    description="Render a directory tree as plain text, Markdown and collapsible HTML",
    author="Otto",
    license="MIT",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["foldertree", "foldertree.*"]),
    package_data={
        "foldertree.interface.locales": ["*.json"],
    },
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
        "build": ["pyinstaller"],
    },
    entry_points={
        'console_scripts': [
            'foldertree=foldertree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
