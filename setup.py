from setuptools import setup
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setup(name='xcsdk',
      version='1.0.0',
      description='Typed classification of xcodebuild SDK identifiers.',
      long_description=long_description,
      long_description_content_type='text/markdown',
      python_requires='>=3.8',
      author='kritanta',
      install_requires=['Pygments'],
      packages=['xcsdk'],
      package_dir={
            'xcsdk': 'src/xcsdk'
      },
      classifiers=[
            'Programming Language :: Python :: 3',
            'License :: OSI Approved :: MIT License',
            'Operating System :: OS Independent'
      ]
      )
