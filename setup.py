from setuptools import setup, find_packages

setup(
    name="canvas-reader",
    version="0.1.0",
    packages=find_packages(include=["canvas_reader*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests>=2.28.0",
        "python-dotenv>=1.0.0",
        "tzdata>=2023.3",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "canvas-reader=canvas_reader.cli:main",
        ],
    },
)
