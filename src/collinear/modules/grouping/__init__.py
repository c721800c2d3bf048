from .grouper import collinear_group, lines_containing
