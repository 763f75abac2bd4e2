"""
GUI package for the Fourier spectrum demo (ttkbootstrap window + controller).
"""
