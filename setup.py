#!/usr/bin/env python3
"""
Setup script for Gesture Pointer
"""

from pathlib import Path

from setuptools import setup, find_packages

HERE = Path(__file__).parent


def read_requirements():
    """Read runtime requirements from requirements.txt"""
    lines = (HERE / "requirements.txt").read_text().splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith("#")]


setup(
    name="gesture-pointer",
    version="0.1.0",
    description="Drive an on-screen pointer with hand gestures from a webcam",
    packages=find_packages(include=["gesture_pointer", "gesture_pointer.*"]),
    package_data={"gesture_pointer": ["config.default.yaml"]},
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["gesture-pointer=gesture_pointer.main:run"],
    },
)
