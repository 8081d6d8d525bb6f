from setuptools import setup, find_packages


setup(name='spiriclib',
      version='0.1.0',
      description='Line/torus intersections through spiric sections',
      license='MIT',
      packages=find_packages(include=['spiriclib', 'spiriclib.*']),
      install_requires=[
          'numpy',
           ],
      extras_require={
          'test': [
              'pytest',
              'scipy',
          ],
      },
      long_description='Sweep-line and bisection search of the intersections '
                       'between a line and a torus, reduced to the spiric '
                       'section cut by the plane containing the line.',
      long_description_content_type='text/markdown',
      keywords='geometry torus spiric intersection',
      classifiers=[
          # How mature is this project? Common values are
          #   3 - Alpha
          #   4 - Beta
          #   5 - Production/Stable
          'Development Status :: 3 - Alpha',

          'Intended Audience :: Science/Research',
          'Intended Audience :: Developers',
          'Topic :: Scientific/Engineering',
          'Topic :: Scientific/Engineering :: Mathematics',

          'License :: OSI Approved :: MIT License',

          'Programming Language :: Python :: 3',
      ],
      zip_safe=False)
