from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="amm-invest",
    version="0.1.0",
    author="Your Name",
    description="Invest a custodial wallet's tokens into Uniswap V1 liquidity pools",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "results", "venv"]),
    package_data={
        "amm_invest": ["abis.json", "protocols/uniswap_v1/*.json"],
    },
    python_requires=">=3.8",
    install_requires=[
        "web3>=6.0.0",
        "eth-abi>=4.0.0",
        "eth-utils>=2.0.0",
        "python-dotenv>=1.0.0",
        "eth-account>=0.9.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "amm-invest=amm_invest.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
