from setuptools import find_packages, setup

setup(
    name="heapperm",
    version="0.1.0",
    packages=find_packages(include=["heapperm", "heapperm.*"]),
    python_requires=">=3.12",
    install_requires=["regex"],
    extras_require={"test": ["pytest"]},
)
