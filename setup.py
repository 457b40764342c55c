"""
Setup configuration for EditRow package.
"""

from setuptools import setup, find_packages

setup(
    name="editrow",
    version="0.1.0",
    description="Grapheme aware line buffer for terminal text editors",
    author="TN3W",
    author_email="tn3w@protonmail.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pygments>=2.19.1",
        "regex>=2024.4.16",
        "windows-curses>=2.4.1; platform_system == 'Windows'",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console :: Curses",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Editors",
    ],
)
