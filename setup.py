from setuptools import setup, find_packages

setup(
    name='Tagkit',
    version='0.1.dev0',
    description='Immutable HTML tag builders and attribute rendering helpers',
    packages=find_packages(exclude=['tests']),
    license='BSD',
    python_requires='>=3.7',
    install_requires=['markupsafe'],
    extras_require={
        'test': ['pytest', 'lxml'],
    }
)
