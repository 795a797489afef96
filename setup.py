from setuptools import setup, find_packages

setup(
    name="schedule_api",
    version="0.1.0",
    packages=find_packages(include=["schedule_api", "schedule_api.*"]),
    install_requires=[
        "numpy",
        "torch",
        "tensorboard"
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
)
