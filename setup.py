from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


setup(
    name="py-nft-indexer",
    package_dir={"": "src"},
    packages=find_packages("src"),
    version="0.1.0",
    description="Simple asynchronous client for the NFT indexer API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.9",
    install_requires=["aiohttp", "pydantic>=2", "loguru"],
    extras_require={"test": ["pytest", "pytest-asyncio"]},
)
