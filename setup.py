from setuptools import setup, find_packages

setup(
    name="sweeper",
    version="0.1",
    packages=find_packages(exclude=["tests"]),
    package_data={
        "sweeper": ["config.yaml"]
    },
    install_requires=[
        "flask",
        "pyyaml",
        "numpy"
    ],
    entry_points={
        "console_scripts": [
            "sweeper-server=frontend.app:main"
        ]
    },
)
