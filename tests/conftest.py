import matplotlib

# tests only ever write image files
matplotlib.use('Agg')
