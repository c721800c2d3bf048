from .maximizer import collinear_groups, largest_collinear_group, max_collinear_points, to_points
