from setuptools import find_packages, setup

setup(
    name="stream-client",
    version="0.1.0",
    packages=find_packages(include=["stream_client", "stream_client.*"]),
    python_requires=">=3.8",
    description="A small client for the Stream activity feed API",
    install_requires=[
        "requests",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
            "responses",
        ],
    },
)
