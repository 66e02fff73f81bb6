from setuptools import setup

setup(
    name='covidplot',
    version='0.1.0',
    description='COVID-19 growth charts aligned on a case threshold, served over HTTP',
    packages=['covidplot'],
    py_modules=['serve'],
    python_requires='>=3.7',
    install_requires=[
        'numpy',
        'matplotlib',
        'flask',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['covidplot-serve=serve:main'],
    },
)
