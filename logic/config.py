"""
Search and session configuration for the TicTacToe engine.
Move ordering and player defaults live here as plain data.
"""


class SearchConfig:
    """
    Configuration class for the game session and the AI opponent.
    Change these values to tune how the engine plays!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored as 9 cells in row-major order
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE

    # ==================== SEARCH SETTINGS ====================
    # Order in which candidate cells are tried:
    # center first, then the four corners, then the four edges.
    # This only changes search speed and tie-breaks, never the value.
    MOVE_ORDER = [4, 0, 2, 6, 8, 1, 3, 5, 7]

    # ==================== PLAYER SETTINGS ====================
    # The AI plays second (O) unless told otherwise
    AI_ENABLED = True
    AI_PLAYS_FIRST = False

    # ==================== DEBUG SETTINGS ====================
    # Print a search summary after every AI decision
    VERBOSE = False
