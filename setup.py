# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="routegen",
    version="0.1.0",
    description="Generate component stub files (Vue/JSX/TSX) from a nested route configuration",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["routegen*"]),
    package_data={"routegen.interface": ["locales/*.json"]},
    python_requires=">=3.8",
    install_requires=[
        "PyYAML",  # YAML route and option files
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'routegen=routegen.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
