"""Bookshelf: a CRUD API for books and their chapters."""
