import pathlib
from setuptools import setup, find_packages

HERE = pathlib.Path(__file__).parent
VERSION = '0.1.0'
PACKAGE_NAME =  'typehinter'
AUTHOR = 'Sélim Ollivier'
AUTHOR_EMAIL = 'selim.ollivier@onera.fr'
LICENSE = 'MIT license'
DESCRIPTION = 'Opt-in runtime argument type enforcement'
LONG_DESCRIPTION = (HERE / "README.md").read_text()
LONG_DESC_TYPE = "text/markdown"
INSTALL_REQUIRES = [
    'torch',
    'numpy',
    'pillow',
    'rich',
]

setup(
    name=PACKAGE_NAME,
    version=VERSION,
    author=AUTHOR,
    author_email=AUTHOR_EMAIL,
    license=LICENSE,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type=LONG_DESC_TYPE,
    install_requires=INSTALL_REQUIRES,
    packages=find_packages(include=['typehinter', 'typehinter.*'])
)
