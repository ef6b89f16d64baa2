"""
Setup script for vectormind package
"""
from setuptools import setup, find_packages
from pathlib import Path

readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

requirements_path = Path(__file__).parent / "requirements.txt"
if requirements_path.exists():
    requirements = [
        line.strip() 
        for line in requirements_path.read_text(encoding="utf-8").splitlines()
        if line.strip() and not line.startswith("#")
    ]
else:
    requirements = [
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        "pydantic>=2.0.0",
        "redis>=6.0.0",
        "openai>=1.0.0",
        "mcp>=1.9.0,<2",
        "numpy>=1.24.0",
        "pyyaml>=6.0"
    ]

setup(
    name="vectormind",
    version="1.0.0",
    description="Text RAG store: document splitting, embeddings and similarity search on Redis",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "httpx>=0.24.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "vectormind=vectormind.cli.main:main",
        ],
    },
    include_package_data=True,
    keywords="rag mcp embeddings redis redisearch vector-search markdown chunking",
)
