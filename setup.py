"""Setup configuration for barkcount package."""

from setuptools import setup, find_packages

setup(
    name="barkcount",
    version="0.1.0",
    description="Dog bark counter: energy-based bark segmentation of audio recordings",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.21.0",
        "soundfile>=0.11.0",
        "librosa>=0.10.0",
        "pydantic>=1.10",
        "fastapi>=0.100.0",
        "python-multipart>=0.0.6",
        "tqdm>=4.60.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
            "black>=22.0.0",
            "mypy>=0.950",
        ],
    },
)
