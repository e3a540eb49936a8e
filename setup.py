from setuptools import setup

setup(
    name="tgf",
    version="0.1.0",
    description="Directed graphs in the trivial graph format",
    license="MIT",
    packages=["tgf"],
    python_requires=">=3.7",
    install_requires=["Jinja2>=3,<4", "PyYAML>=5.1", "watchdog>=2"],
    extras_require={"tests": ["pytest>=6"]},
    entry_points={"console_scripts": ["tgf = tgf.cli:main"]},
)
