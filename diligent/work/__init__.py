"""Namespace for units of SQL work; it holds no modules yet."""