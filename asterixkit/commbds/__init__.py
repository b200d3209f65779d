"""Decoding of Mode S Comm-B registers 4,0, 5,0 and 6,0 and of the BDS code that selects them."""