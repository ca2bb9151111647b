from setuptools import setup, find_packages

setup(
    name="pdp-analysis",
    version="0.1.0",
    python_requires=">=3.10, <4",
    packages=find_packages(include=["pdpanalysis", "pdpanalysis.*"]),
    install_requires=[
        "numpy",
        "pandas",
        "scikit-learn",
        "scipy",
        "joblib",
        "tqdm",
    ],
    extras_require={
        "dev": [
            "matplotlib",
            "pyyaml",
            "mypy",
            "pylint",
            "black"
        ],
        "test": [
            "pytest",
        ]
    }
)
