"""Certificate template service.

Templates own ordered pages, pages own ordered elements, and the whole tree
renders to a paginated document.
"""
