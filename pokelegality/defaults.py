""" pokelegality.defaults - logic for finding default paths """

import os


def get_default_data_dir_with_origin():
    data_dir = os.environ.get('POKELEGALITY_DATA_DIR', None)
    origin = 'environment'

    if data_dir is None:
        data_dir = os.path.join(os.path.dirname(__file__), 'data')
        origin = 'default'

    return data_dir, origin


def get_default_data_dir():
    return get_default_data_dir_with_origin()[0]
