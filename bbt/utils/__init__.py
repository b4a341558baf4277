"""constants, math helpers and dataset containers"""
