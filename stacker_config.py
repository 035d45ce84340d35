
CONFIG = {
    "CELL_SIZE": 32,
    "FPS": 60,
    "GRAVITY_FRAMES": 20,
    "NEXT_PREVIEW": 5,
    "KEY_DELAY_MS": 170,
    "KEY_REPEAT_MS": 50,
    "LOG_LEVEL": "INFO",
}
