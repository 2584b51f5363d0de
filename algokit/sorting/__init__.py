"""Sorting algorithms and a sortedness check."""