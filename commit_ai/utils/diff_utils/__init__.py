from .context import *
from .fetcher import *
from .parser import *
from .sampler import *

__all__ = [
    # Assembly
    'DiffPayload',
    'get_smart_diff',

    # Git access
    'open_repository',
    'fetch_diff',
    'fetch_branch_diff',
    'fetch_working_diff',
    'stage_all',
    'show_file',
    'commit',

    # Parsing
    'parse_diff',
    'changed_files',

    # Sampling
    'sample_content',
    'get_smart_file_content',
]
