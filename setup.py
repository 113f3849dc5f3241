from setuptools import setup, find_packages

setup(
    name="portfolio-cms",
    version="0.1",
    packages=find_packages(include=["portfolio", "portfolio.*"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "pydantic[email]>=2",
        "pydantic-settings",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        "bcrypt==4.0.1",
        "python-multipart",
        "minio>=7.2,<8",
        "requests",
        "psycopg2-binary",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    python_requires=">=3.9",
)
