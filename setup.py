from setuptools import setup, find_packages

setup(
    name="quadbench",
    version="0.1.0",
    description="Trapezoidal vs Monte Carlo integration convergence tables",
    author="quadbench developers",
    packages=find_packages(include=["quadbench", "quadbench.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
