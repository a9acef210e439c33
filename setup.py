from setuptools import setup, find_packages


requirements = [
    "numpy",
    "colorlog",
    "toml",
    "tabulate",
    "pytest",
]

setup(
    name="gradual-isqrt",
    version="1.0.0",
    description="Integer square roots of gradually changing fixed-width integers",
    python_requires=">=3.10",
    package_dir={
        "": "src",
    },
    packages=find_packages("src"),
    install_requires=requirements,
)
