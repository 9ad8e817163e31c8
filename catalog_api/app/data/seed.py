"""
Startup content of the in-memory collections.

Each function returns fresh model instances so that every application
(and every test) starts from an untouched copy.
"""

from typing import List

from ..schemas.author import AuthorRead
from ..schemas.book import BookRead
from ..schemas.category import CategoryRead
from ..schemas.game import GameRead


def games() -> List[GameRead]:
    return [
        GameRead(id=1, title="valorant", platform="PC", year=2020, is_favorite=True),
        GameRead(id=2, title="Genshin Impact", platform="PC", year=2020, is_favorite=False),
        GameRead(id=3, title="minecraft", platform="Multi-platform", year=2011, is_favorite=True),
        GameRead(id=4, title="pacman", platform="Arcade", year=1980, is_favorite=True),
        GameRead(id=5, title="The Legend of Zelda: Ocarina of Time", platform="Nintendo 64", year=1998, is_favorite=True),
    ]


def books() -> List[BookRead]:
    return [
        BookRead(id=1, title="Les Miserables", author="Victor Hugo", year=1862, genre="Roman", price=14.5, in_stock=True, rating=4.8),
        BookRead(id=2, title="L'Etranger", author="Albert Camus", year=1942, genre="Roman", price=7.9, in_stock=True, rating=4.3),
        BookRead(id=3, title="Harry Potter a l'ecole des sorciers", author="J.K. Rowling", year=1997, genre="Fantasy", price=9.5, in_stock=False, rating=4.7),
        BookRead(id=4, title="1984", author="George Orwell", year=1949, genre="Science-Fiction", price=8.2, in_stock=True, rating=4.6),
        BookRead(id=5, title="Dune", author="Frank Herbert", year=1965, genre="Science-Fiction", price=12.9, in_stock=True, rating=4.5),
        BookRead(id=6, title="Le Seigneur des anneaux", author="J.R.R. Tolkien", year=1954, genre="Fantasy", price=24.0, in_stock=False, rating=4.9),
        BookRead(id=7, title="Notre-Dame de Paris", author="Victor Hugo", year=1831, genre="Aventure", price=11.0, in_stock=True, rating=3.9),
        BookRead(id=8, title="Harry Potter et l'Enfant maudit", author="J.K. Rowling", year=2016, genre="Fantasy", price=15.0, in_stock=True, rating=3.2),
    ]


def authors() -> List[AuthorRead]:
    return [
        AuthorRead(id=1, first_name="Victor", last_name="Hugo", nationality="Francaise", birth_year=1802, is_alive=False),
        AuthorRead(id=2, first_name="Albert", last_name="Camus", nationality="Francaise", birth_year=1913, is_alive=False),
        AuthorRead(id=3, first_name="J.K.", last_name="Rowling", nationality="Britannique", birth_year=1965, is_alive=True),
        AuthorRead(id=4, first_name="George", last_name="Orwell", nationality="Britannique", birth_year=1903, is_alive=False),
        AuthorRead(id=5, first_name="Frank", last_name="Herbert", nationality="Americaine", birth_year=1920, is_alive=False),
        AuthorRead(id=6, first_name="J.R.R.", last_name="Tolkien", nationality="Britannique", birth_year=1892, is_alive=False),
    ]


def categories() -> List[CategoryRead]:
    return [
        CategoryRead(id=1, name="Roman", description="Romans classiques et contemporains", book_count=3),
        CategoryRead(id=2, name="Fantasy", description="Mondes imaginaires et magie", book_count=2),
        CategoryRead(id=3, name="Science-Fiction", description="Exploration de futurs possibles et technologies", book_count=1),
        CategoryRead(id=4, name="Aventure", description="Recits d'aventures et d'exploration", book_count=2),
    ]
