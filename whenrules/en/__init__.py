"""Date and time rules for English."""