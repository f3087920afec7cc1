"""Setup script for bethe_bloch package."""

from setuptools import setup, find_packages

setup(
    name='bethe_bloch',
    version='1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={'bethe_bloch.config': ['defaults.yaml']},
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20.0',
        'matplotlib>=3.5.0',
        'PyYAML>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'bethe-bloch-viewer=bethe_bloch.app.viewer:main',
        ],
    },
)
