'''Parses the configuration file and sets the runtime settings.

Only settings for the command line front end live here. The constants that
define the derivation scheme are in constants.py and cannot be configured.
'''

import os
from os.path import join, isfile
from configparser import ConfigParser

CONFIG_FILE = join(os.getcwd(), 'keychain.cfg')
SECTION = 'CONSTANTS'

DEFAULTS = {
    'loglevel': 'info',
    'chain_path': 'm',
}


def load(config_file=CONFIG_FILE):
    """
    Return a ConfigParser holding DEFAULTS overridden by `config_file`
    when it exists.
    """
    cfg = ConfigParser(DEFAULTS)
    if isfile(config_file):
        cfg.read(config_file)
    if not cfg.has_section(SECTION):
        cfg.add_section(SECTION)
    return cfg


cfg = load()

LOGLEVEL = cfg.get(SECTION, 'loglevel').lower()
CHAIN_PATH = cfg.get(SECTION, 'chain_path')
