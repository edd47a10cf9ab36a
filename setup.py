from setuptools import setup, find_packages

setup(
    name="predpreysim",
    version="0.1",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    description="Predator-prey gridworld simulation with aging, hunger, breeding and overcrowding.",
    author="P. van Doesburg",
    author_email="petervandoesburg11@gmail.com",
    url="https://github.com/doesburg11/predpreygrass",
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pygame",
    ],
    extras_require={
        "plot": ["matplotlib"],
        "test": ["pytest", "matplotlib"],
    },
)
