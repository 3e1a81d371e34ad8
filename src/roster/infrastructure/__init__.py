"""Infrastructure layer: remote data service access"""
