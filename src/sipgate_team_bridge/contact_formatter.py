from sipgate_team_bridge.bridge.models import Contact


def format_contact_summary(contact: Contact) -> str:
    """Format a canonical contact for command line output."""
    name = contact.name or f"{contact.first_name or ''} {contact.last_name or ''}".strip() or "(no name)"

    lines = [f"Id: {contact.id}", f"  Name: {name}"]
    if contact.email:
        lines.append(f"  Email: {contact.email}")
    if contact.organization:
        lines.append(f"  Organization: {contact.organization}")
    for p in contact.phone_numbers:
        lines.append(f"  Phone ({p.label.value.lower()}): {p.phone_number}")

    return "\n".join(lines)
