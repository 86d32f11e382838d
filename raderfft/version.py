# coding: utf-8
# Release information for RaderFFT.

version = '1.0.0'
release = True
