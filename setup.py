from setuptools import setup, find_packages

setup(
    name="sudoku-editor",
    version="1.0.0",
    description="Interactive Sudoku grid editor with rule-checked placements",
    author="robomotic",
    packages=find_packages(include=["sudoku_editor", "sudoku_editor.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "sudoku-editor=sudoku_editor.cli:main",
        ],
    },
)
