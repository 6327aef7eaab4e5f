from setuptools import setup, find_packages

setup(
    name='osc_sdk_python',
    version='0.1.0',
    description='Open Sound Control packet codec with recursive bundle dispatch',
    packages=find_packages(include=['osc_sdk_python', 'osc_sdk_python.*']),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
