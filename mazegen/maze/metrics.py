from typing import Dict


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'seed': 0,
        'cells': 0,
        'walls_opened': 0,
        'rooms_placed': 0,
        'room_cells_cleared': 0,
        'walls_closed': 0,
        'walls_thinned': 0,
        'walls_emitted': 0,
        'sample_range': 0,
        'sample_limit': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
