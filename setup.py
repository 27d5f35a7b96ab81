import setuptools

with open('README.md', 'r') as file:
    long_description = file.read()

setuptools.setup(
    name='opticalbar',
    version='0.1.0b1',
    description='Image-formation geometry of panoramic optical bar cameras',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='',
    keywords='photogrammetry panoramic optical bar camera satellite reconnaissance',
    package_dir={'': 'src'},
    packages=[
        'opticalbar'
    ],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        'Topic :: Scientific/Engineering :: GIS',
        'Topic :: Scientific/Engineering :: Image Processing'
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy >= 1.17',
        'scipy >= 1.4'
    ],
    extras_require={
        'dev': [
            'pytest',
            'nox',
            'flake8',
            'black',
            'sphinx',
            'sphinx-rtd-theme'
        ]
    }
)
