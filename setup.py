"""Setup file for TodoList package."""
from setuptools import setup, find_namespace_packages

setup(
    name="todolist",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["todolist*"]),
    install_requires=[
        "SQLAlchemy>=2.0",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "python-dotenv>=1.0",
        "loguru>=0.7",
        "passlib[argon2]>=1.7.4",
        "streamlit>=1.32",
    ],
    extras_require={
        "test": [
            "pytest>=8.1.1",
        ],
    },
    python_requires=">=3.9",
)
