"""Letter-grid word search, string hashing, an open-addressing hash table and a Mersenne Twister."""

__version__ = "0.1.0"
__all__ = ["boggle", "hashtable", "ht_demo", "mt19937", "probers", "strhash", "strhash_cli"]