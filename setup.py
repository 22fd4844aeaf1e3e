"""setuptools configuration for TimerProgress.

Install for development:
    pip install -e ".[test]"
"""

from setuptools import setup, find_packages

setup(
    name="timerprogress",
    version="0.1.0",
    description="Polling progress timer with pause and completion hooks",
    packages=find_packages(include=["timerprogress", "timerprogress.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["timerprogress=timerprogress.__main__:main"],
    },
)
