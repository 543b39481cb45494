# ripplesnake/viz/renderer_colors.py
BG = (15, 15, 15)
GRID = (28, 28, 28)
FOOD = (220, 70, 70)
HEAD = (60, 200, 90)
BODY = (40, 160, 70)
EYE = (15, 15, 15)
TEXT = (230, 230, 230)
DIM = (0, 0, 0, 140)
GLOW = (120, 200, 255)
