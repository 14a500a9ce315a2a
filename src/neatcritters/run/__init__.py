"""
Run Package

Configuration and reproduction context for evolving creature genomes.

Exported Classes:
    Config:  Configuration parameters, parsed from an INI file or defaulted
    Lineage: Reproduction context (configuration, random source, innovation tracker)
"""

from neatcritters.run.config  import Config
from neatcritters.run.lineage import Lineage

__all__ = ['Config',
           'Lineage']
