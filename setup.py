from pathlib import Path

from setuptools import setup, find_packages


def get_description() -> str:
    readme_path = Path(__file__).parent / "README.md"

    if not readme_path.exists():
        return """
        # devsignal
        """.strip()

    return readme_path.read_text(encoding="utf-8")


setup(
    name="devsignal",
    version="0.1.0",
    description="Anonymous device identifier resolution for analytics attribution",
    long_description=get_description(),
    long_description_content_type="text/markdown",
    license="BSD-3-Clause",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    packages=find_packages(include=["devsignal", "devsignal.*"]),
    include_package_data=True,
    install_requires=[
        "pydantic >= 1.9",
        "overrides >= 7.3.1",
        "typing_extensions >= 4.5.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
)
