from setuptools import setup, find_packages

setup(
    name="hexudoku",
    version="1.0.0",
    description="Hexagonal Sudoku Puzzle Engine & Generator",
    author="robomotic",
    packages=find_packages(include=["hexudoku", "hexudoku.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "seaborn>=0.11.0",
        "tqdm>=4.62.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "hexudoku=hexudoku.cli:main",
        ],
    },
)
