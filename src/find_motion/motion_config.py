# motion_config.py
"""
Configuration for Full-Search Block Motion Estimation
"""

# ========== BLOCK MATCHING ==========
MATCHING = {
    'block_size': 16,    # Macroblock size in pixels (BSIZE)
    'step': 8,           # Spacing between motion vectors (MSTEP)
    'search_range': 16,  # Displacements span [-16, 15] on both axes
    'margin_near': 2,    # Grid steps skipped at the top/left edge
    'margin_far': 4      # Grid steps skipped at the bottom/right edge
}

# ========== DENOISING ==========
MEDIAN = {
    'enabled': True,       # Median filter both frames before matching
    'in_place_scan': True  # Sequential row-major scan over the live buffer
}

# ========== PERFORMANCE ==========
PERFORMANCE = {
    'num_workers': 4,       # Threads used across grid rows (1 = sequential)
    'show_progress': False  # tqdm progress bar over grid rows
}

# ========== DEBUG/ANALYTICS ==========
DEBUG = {
    'log_level': 'INFO',
    'log_format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
}

BSIZE = MATCHING['block_size']
MSTEP = MATCHING['step']


def validate_config():
    """Ensure configuration values are valid"""
    assert MATCHING['block_size'] == 16, "Only 16x16 blocks are supported"
    assert MATCHING['step'] == 8, "Motion vectors are sampled every 8 pixels"
    assert MATCHING['search_range'] == MATCHING['block_size'], "Search range must equal block size"
    assert 0 <= MATCHING['margin_near'] < MATCHING['margin_far'], "Invalid grid margins"
    assert PERFORMANCE['num_workers'] >= 1, "Need at least one worker"
    assert DEBUG['log_level'] in {'DEBUG', 'INFO', 'WARNING', 'ERROR'}, "Unknown log level"

# Validate configuration on import
validate_config()
