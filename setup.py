# setup.py
from setuptools import setup, find_packages

setup(
    name="fuzzel-pass",
    version="0.1.0",
    description="Pick a password from pass with fuzzel and copy or type one of its fields",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "fuzzel_pass": ["interface/locales/*.json"],
    },
    install_requires=[
        "pyperclip",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fuzzel-pass=fuzzel_pass.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)
