"""
Rug invoicing engine.

Pure pricing math for rug invoices and consignments, plus a small HTTP
surface so the editor, storage and print collaborators can call it.
"""
