from setuptools import setup, find_packages

setup(
    name="youtube-transcript-server",
    version="1.0.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={
        "transcript_server": ["templates/*.html", "static/*"],
    },
    include_package_data=True,
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.0",
        "jinja2>=3.1",
        "python-multipart>=0.0.9",
        "youtube-transcript-api>=1.0.0",
        "python-dotenv>=1.0.0",
        "colorlog>=6.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "httpx>=0.24",
            "pytest-cov>=4.1",
        ],
    },
    entry_points={
        "console_scripts": [
            "transcript-server=transcript_server.app:main",
        ],
    },
    python_requires=">=3.9",
    description="HTTP API returning YouTube caption tracks as plain text or timestamped segments",
    author="Venkatesh Murugadas",
)
