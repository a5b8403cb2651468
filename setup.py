from setuptools import setup, find_packages

setup(
    name="aoc_toolkit",
    version="0.1.0",
    packages=find_packages(include=["aoc_toolkit", "aoc_toolkit.*"]),
    package_data={"aoc_toolkit": ["configs/*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "grid-maze=aoc_toolkit.scripts.grid_maze:main",
            "wall-maze=aoc_toolkit.scripts.wall_maze:main",
        ]
    },
)
