import os
from setuptools import setup, find_packages
from setuptools.command.build_py import build_py as _build

CLASSIFIERS = [
    'Operating System :: POSIX',
    'Operating System :: MacOS :: MacOS X',
    'Intended Audience :: Developers',
    'Intended Audience :: Financial and Insurance Industry',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Topic :: Office/Business :: Financial'
]

pkgdir = os.path.dirname(os.path.abspath(__file__))

def get_version():
    out = "dev"
    versfile = os.path.join(os.environ.get('PACKAGE_DIR', pkgdir), 'VERSION')
    if os.path.exists(versfile):
        with open(versfile) as fd:
            parts = fd.readline().split()
        if len(parts) > 0:
            out = parts[-1]
    else:
        out = "(unknown)"
    return out

def write_version_mod(version, pydir):
    versmodf = os.path.join(pydir, "mambu", "apisdk", "version.py")
    print("setting version for mambu.apisdk")
    with open(versmodf, 'w') as fd:
        fd.write('"""')
        fd.write("""
An identification of the package version.  Note that this module file gets 
(over-) written by the build process.  
""")
        fd.write('"""\n\n')
        fd.write('__version__ = "')
        fd.write(version)
        fd.write('"\n')

class build(_build):

    def run(self):
        write_version_mod(get_version(), os.path.join(pkgdir, "python"))
        _build.run(self)

setup(name='mambu-apisdk',
      version=get_version(),
      description="mambu.apisdk: a python client library for the Mambu REST API",
      scripts=[ 'scripts/mambu.py' ],
      package_dir={'': 'python'},
      packages=find_packages(where='python', include=['mambu', 'mambu.*']),
      install_requires=[ 'requests', 'PyYAML', 'simplejson' ],
      extras_require={ 'test': [ 'pytest' ] },
      python_requires='>=3.6',
      cmdclass={'build_py': build},
      classifiers=CLASSIFIERS,
      zip_safe=False
)
