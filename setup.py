from setuptools import setup, find_packages

setup(
    name="chomping-glass",
    version="0.1.0",
    description="Perfect-play move bot for Chomping Glass (5x8 Chomp)",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config", "play"],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "chomp-bot=play:main",
            "chomp-tablebase=tablebase.builder:main",
        ],
    },
)
