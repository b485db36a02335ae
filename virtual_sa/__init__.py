"""NVIDIA Virtual SA service"""
