from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="curvecloak",
    version="1.0.0",
    packages=find_packages(include=["curvecloak", "curvecloak.*"]),
    install_requires=[
        "numpy>=1.24.0",
        "pillow>=10.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["curvecloak=curvecloak.main:main"],
    },
    python_requires=">=3.10",
    description="Reversible pixel scrambling along a gilbert space-filling curve",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
