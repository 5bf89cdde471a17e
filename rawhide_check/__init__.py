"""rawhide-check — is there a Rust devel package in Fedora Rawhide?"""

__version__ = "0.1.0"
