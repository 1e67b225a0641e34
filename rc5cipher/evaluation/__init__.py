"""
Evaluation Package

Statistical checks of the cipher's diffusion.
"""

from .avalanche import AvalancheResult, measure_avalanche, hamming_distance

__all__ = ['AvalancheResult', 'measure_avalanche', 'hamming_distance']
