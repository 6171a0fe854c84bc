from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="storygraph",
    version="0.1.0",
    description="Character-proximity timelines in the style of xkcd's movie narrative charts",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy",
        "pandas",
        "plotly",
        "streamlit",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["storygraph=storygraph.cli:main"]},
)
