from setuptools import setup, find_packages

setup(
    name="adaptquad",
    version="0.1.0",
    description="Adaptive Simpson quadrature with non-fatal convergence diagnostics",
    author="adamfilli",
    packages=find_packages(include=["adaptquad", "adaptquad.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "dev": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.10",
)
