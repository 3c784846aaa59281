from .data_generator import generate_data, summarize

__all__ = ['generate_data', 'summarize']
