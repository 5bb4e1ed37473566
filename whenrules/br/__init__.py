"""Date and time rules for Brazilian Portuguese."""