"""Space shooter parts: an entity-component registry, components, movement and enemy spawning."""