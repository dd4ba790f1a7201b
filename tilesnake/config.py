"""
config.py — Defaults for the grid, tick timing, colours and HUD text.
Plain values only; model, view and controller all import from here.
"""

# ── Grid & Window ─────────────────────────────────────────────────
GRID_W, GRID_H  = 40, 30
TILE            = 16          # pixels per cell (render only)
HUD_H           = 28
FPS             = 60

# ── Gameplay ──────────────────────────────────────────────────────
MAX_SCORE       = 30          # food items needed to win
GROWTH_RATE     = 5           # segments added when eating food
TICK_DELAY_MS   = 60          # fixed interval between advance() calls
MAX_CATCH_UP    = 5           # ticks run per frame at most after a stall

# ── Colors ────────────────────────────────────────────────────────
EMPTY_COL   = (0,   0,   0)
FOOD_COL    = (255, 0,   0)
HEAD_COL    = (120, 230, 120)
BODY_COL    = (150, 150, 255)
HUD_BG      = (12,  12,  20)
HUD_TEXT    = (200, 200, 220)
WIN_COL     = (255, 228, 77)
CRASH_COL   = (255, 51,  102)

# ── HUD text ──────────────────────────────────────────────────────
MSG_WELCOME = "Welcome! Use the arrow keys or WASD"
MSG_SCORE   = "Score: {score} of {max_score}"
MSG_WON     = "You have won!"
MSG_RESTART = "press R to restart"
MSG_CRASHED = {
    "wall": "Crashed into the wall",
    "self": "Crashed into yourself",
}
