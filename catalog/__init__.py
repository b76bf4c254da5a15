"""TNQDO course and blog catalog backend."""
