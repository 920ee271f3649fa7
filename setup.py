from setuptools import setup, find_packages

setup(
    name="portfolio-metrics",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"portfolio_metrics": ["data/*.json"]},
    include_package_data=True,
    install_requires=[
        "pandas>=2.0",
        "numpy>=1.24",
        "matplotlib>=3.7",
        "seaborn>=0.12",
        "reportlab>=4.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "portfolio-metrics=portfolio_metrics.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="Validated metrics store, aggregation and dashboard reporting for a customer success portfolio",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ]
)
