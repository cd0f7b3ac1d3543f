# --- Параметри лабіринту ---
MAZE_WIDTH = 15
MAZE_HEIGHT = 15
MAZE_SEED = None # None -> випадковий сід, який зберігається в лабіринті

# Менші розміри ламають арифметику індексів у цільових зонах та пробах на ±2
MIN_MAZE_SIZE = 5
GOAL_ZONE_SIZE = 4
START_POS = (1, 1) # (row, col) клітинки, з якої починається вирізання

# --- Параметри аналізу ---
STATS_SAMPLE_SIZE = 50
STATS_PLOT_DPI = 300

# --- Логування ---
LOG_LEVEL = "INFO"
