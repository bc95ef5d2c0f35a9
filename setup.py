from setuptools import setup, find_packages

setup(
    name="layoutswap",
    version="0.1.0",
    description="layoutswap — convert text typed on the wrong keyboard layout (EN ↔ UA)",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "dev": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "layoutswap=layoutswap.main:main",
        ],
    },
)
