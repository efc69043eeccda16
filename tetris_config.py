
CONFIG = {
    "CELL_SIZE": 20,
    "TICK_MS": 50,
    "FLASH_TICKS": 8,
    "GRAVITY_PERIOD": 20,
    "GRAVITY_FLOOR": 2,
    "SPEEDUP_EVERY": 10,
    "SEED": None,
}
