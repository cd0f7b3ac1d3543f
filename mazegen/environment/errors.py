class MazeError(Exception):
    """Базовий клас для всіх помилок генерації та зберігання лабіринтів."""


class InvalidDimensions(MazeError, ValueError):
    """Ширина або висота лабіринту менша за мінімально підтримуваний розмір."""

    def __init__(self, width, height, minimum: int):
        self.width = width
        self.height = height
        self.minimum = minimum
        super().__init__(
            f"Width and height must be integers >= {minimum}, got {width}x{height}."
        )


class GenerationInvariantViolation(MazeError, RuntimeError):
    """
    Стек повернень спорожнів, а невідвідані клітинки ще залишились.
    Це дефект у обліку сусідів, а не помилка часу виконання, тому не повторюється.
    """


class MazeFormatError(MazeError, ValueError):
    """Збережена сітка лабіринту пошкоджена або має неочікуваний формат."""


class InvalidSeed(MazeError, ValueError):
    """Сід не є цілим числом у діапазоні [0, 2**64-1] або переданий разом з rng."""
