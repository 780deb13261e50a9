# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="treeforge",
    version="1.0.0",
    description="Create directories and empty files from text tree diagrams",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treeforge", "treeforge.*"]),
    python_requires=">=3.8",
    install_requires=[
        "customtkinter",  # GUI editor (treeforge without arguments)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treeforge=treeforge.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
