import setuptools

with open('README.md', 'rt') as f:
    long_description = f.read()

setuptools.setup(
    name='bitfloat',
    version='0.1.0',
    description='decode and classify IEEE 754-like floating point bit patterns of any width',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',
    python_requires='>=3.8',
    install_requires=['numpy>=1.23.0', 'gmpy2>=2.1.2', 'matplotlib>=3.5'],
    extras_require={
        'test': ['pytest>=7'],
    },
    packages=['bitfloat', 'bitfloat.bits', 'bitfloat.arithmetic', 'bitfloat.tools'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Operating System :: POSIX :: Linux',
        'License :: OSI Approved :: MIT License',
    ],
)
