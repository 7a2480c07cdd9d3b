"""Domain model: statuses, hotdesks, meeting rooms, offices and their reservations."""