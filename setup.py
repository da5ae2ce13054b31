from setuptools import setup, find_packages

setup(
    name="dbug",
    version="0.1.0",
    description="Namespace-gated debug logging driven by the DEBUG environment variable",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={
        "dev": ["pytest>=7", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "dbug=dbug.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
