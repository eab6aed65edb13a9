from setuptools import find_packages, setup

setup(
    name="mongoquery",
    version="0.1.0",
    description="Async MongoDB data-access layer: collection queries, writes and bulk operations",
    packages=find_packages(include=["mongoquery", "mongoquery.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pymongo>=4.10",  # MongoDB (async API)
        "pydantic>=2.0",  # Configuration and result models
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "mongomock",  # In-memory MongoDB for tests
        ],
    },
)
