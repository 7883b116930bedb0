"""DocKernel HTTP API"""
