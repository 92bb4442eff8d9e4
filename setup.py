from setuptools import setup, find_packages

setup(
    name="hexsudoku",
    version="1.0.0",
    description="Hexadecimal (16x16) Sudoku solver using constraint propagation and backtracking search",
    packages=find_packages(include=["hexsudoku", "hexsudoku.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "hexsudoku=hexsudoku.cli:main",
        ],
    },
)
