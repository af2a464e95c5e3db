from setuptools import setup, find_packages

setup(
    name="state-object-demo",
    version="0.1.0",
    description="A parent-owned, lazily loaded view model sample built with PySide6",
    author="",
    author_email="",
    packages=find_packages(include=["state_object_demo", "state_object_demo.*"]),
    install_requires=[
        "PySide6>=6.6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "state-object-demo=state_object_demo.main:main",
        ],
    },
)
