
CONFIG = {
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 20,
    "HIDDEN_ROWS": 2,
    "CELL_SIZE": 16,
    "GRAVITY_MS": 800,
    "GENERATOR": "bag",
    "SEED": None,
    "QUIT_KEYS": "zo",
    "FPS": 60,
}
