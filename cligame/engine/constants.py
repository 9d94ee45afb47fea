"""Centralized configuration constants for the game loop and the world."""

# Длительность одного тика симуляции в секундах.
FRAME_DURATION = 0.1
# Максимальное ожидание ввода за одну итерацию цикла.
INPUT_TIMEOUT = 0.01

STARTING_HEALTH = 100
ENEMY_DAMAGE = 50
BOMB_DAMAGE = 25
# Враг делает шаг раз в столько тиков.
ENEMY_MOVE_DELAY = 4

PLAYER_GLYPH = "@"
COOKIE_GLYPH = "o"
BOMB_GLYPH = "x"
ENEMY_GLYPH = "M"

QUIT_KEY = "q"
MOVES = {
    "w": (0, -1),
    "s": (0, 1),
    "a": (-1, 0),
    "d": (1, 0),
}

# Отладочный журнал включается переменной окружения.
DEBUG_ENV_VAR = "DEBUG_GAME"
DEBUG_LOG_ENV_VAR = "CLIGAME_DEBUG_LOG"
DEBUG_LOG_PATH = "debug.log"
