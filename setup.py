from setuptools import setup, find_packages

setup(
    name="chalkee",
    version="0.1.0",
    description="Chainable ANSI terminal text styling",
    packages=find_packages(include=["chalkee", "chalkee.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
)
